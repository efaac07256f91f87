GUESTS_URL = "/api/guests"
GUEST_URL = "/api/guests/{guest_id}"
WEDDING_GUESTS_URL = "/api/guests/wedding/{wedding_id}"

# Cache key prefix for a wedding's guest list, followed by the wedding id.
WEDDING_GUESTS_QUERY = "/api/guests/wedding"
