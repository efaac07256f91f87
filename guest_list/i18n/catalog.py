from guest_list.guests.dtos import Language

MESSAGES_EN = {
    "guestList.totalGuests": "Total Guests",
    "guestList.confirmed": "Confirmed",
    "guestList.declined": "Declined",
    "guestList.pending": "Pending",
    "guestList.maybe": "Maybe",
    "guestList.searchGuests": "Search guests...",
    "guestList.filterByStatus": "Filter by status",
    "guestList.filterByCategory": "Filter by category",
    "guestList.allStatuses": "All statuses",
    "guestList.allCategories": "All categories",
    "guestList.family": "Family",
    "guestList.friends": "Friends",
    "guestList.colleagues": "Colleagues",
    "guestList.other": "Other",
    "guestList.addGuest": "Add Guest",
    "guestList.addNewGuest": "Add New Guest",
    "guestList.editGuest": "Edit Guest",
    "guestList.guestName": "Guest name",
    "guestList.email": "Email",
    "guestList.phone": "Phone",
    "guestList.category": "Category",
    "guestList.guestAdded": "Guest added",
    "guestList.guestAddedSuccess": "The guest has been added to your list.",
    "guestList.guestUpdated": "Guest updated",
    "guestList.guestUpdatedSuccess": "The guest has been updated.",
    "guestList.guestDeleted": "Guest deleted",
    "guestList.guestDeletedSuccess": "The guest has been removed from your list.",
    "guestList.saveFailed": "Could not save guest",
    "guestList.deleteFailed": "Could not delete guest",
    "guestList.noGuestsFound": "No guests match the current filters.",
    "guestList.noGuestsYet": "No guests yet. Add your first guest to get started.",
    "guestList.loading": "Loading guests...",
    "common.cancel": "Cancel",
    "common.save": "Save",
    "common.saving": "Saving...",
}

MESSAGES_ES = {
    "guestList.totalGuests": "Total de invitados",
    "guestList.confirmed": "Confirmados",
    "guestList.declined": "Rechazados",
    "guestList.pending": "Pendientes",
    "guestList.maybe": "Quizás",
    "guestList.searchGuests": "Buscar invitados...",
    "guestList.family": "Familia",
    "guestList.friends": "Amigos",
    "guestList.colleagues": "Compañeros",
    "guestList.other": "Otros",
    "guestList.addGuest": "Añadir invitado",
    "guestList.addNewGuest": "Añadir nuevo invitado",
    "guestList.editGuest": "Editar invitado",
    "guestList.guestAdded": "Invitado añadido",
    "guestList.guestAddedSuccess": "El invitado se ha añadido a tu lista.",
    "guestList.guestUpdated": "Invitado actualizado",
    "guestList.guestUpdatedSuccess": "El invitado se ha actualizado.",
    "guestList.guestDeleted": "Invitado eliminado",
    "guestList.guestDeletedSuccess": "El invitado se ha eliminado de tu lista.",
    "guestList.saveFailed": "No se pudo guardar el invitado",
    "guestList.deleteFailed": "No se pudo eliminar el invitado",
    "guestList.noGuestsFound": "Ningún invitado coincide con los filtros.",
    "guestList.noGuestsYet": "Aún no hay invitados.",
    "guestList.loading": "Cargando invitados...",
    "common.cancel": "Cancelar",
    "common.save": "Guardar",
    "common.saving": "Guardando...",
}

MESSAGES_NL = {
    "guestList.totalGuests": "Totaal gasten",
    "guestList.confirmed": "Bevestigd",
    "guestList.declined": "Afgemeld",
    "guestList.pending": "In afwachting",
    "guestList.maybe": "Misschien",
    "guestList.searchGuests": "Gasten zoeken...",
    "guestList.family": "Familie",
    "guestList.friends": "Vrienden",
    "guestList.colleagues": "Collega's",
    "guestList.other": "Overig",
    "guestList.addGuest": "Gast toevoegen",
    "guestList.addNewGuest": "Nieuwe gast toevoegen",
    "guestList.editGuest": "Gast bewerken",
    "guestList.guestAdded": "Gast toegevoegd",
    "guestList.guestAddedSuccess": "De gast is aan je lijst toegevoegd.",
    "guestList.guestUpdated": "Gast bijgewerkt",
    "guestList.guestUpdatedSuccess": "De gast is bijgewerkt.",
    "guestList.guestDeleted": "Gast verwijderd",
    "guestList.guestDeletedSuccess": "De gast is van je lijst verwijderd.",
    "guestList.saveFailed": "Gast kon niet worden opgeslagen",
    "guestList.deleteFailed": "Gast kon niet worden verwijderd",
    "guestList.noGuestsFound": "Geen gasten gevonden met deze filters.",
    "guestList.noGuestsYet": "Nog geen gasten.",
    "guestList.loading": "Gasten laden...",
    "common.cancel": "Annuleren",
    "common.save": "Opslaan",
    "common.saving": "Opslaan...",
}

CATALOGS: dict[Language, dict[str, str]] = {
    Language.EN: MESSAGES_EN,
    Language.ES: MESSAGES_ES,
    Language.NL: MESSAGES_NL,
}
