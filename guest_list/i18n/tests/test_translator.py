from guest_list.guests.dtos import Language
from guest_list.i18n.catalog import CATALOGS, MESSAGES_EN
from guest_list.i18n.translator import Translator


def test_english_lookup():
    t = Translator()
    assert t("guestList.confirmed") == "Confirmed"


def test_spanish_lookup():
    t = Translator(Language.ES)
    assert t.t("guestList.editGuest") == "Editar invitado"


def test_missing_translation_falls_back_to_english():
    t = Translator(Language.NL)
    assert "guestList.filterByStatus" not in CATALOGS[Language.NL]
    assert t("guestList.filterByStatus") == MESSAGES_EN["guestList.filterByStatus"]


def test_unknown_key_returns_key():
    assert Translator()("guestList.doesNotExist") == "guestList.doesNotExist"


def test_translated_catalogs_only_use_known_keys():
    for language, messages in CATALOGS.items():
        assert set(messages) <= set(MESSAGES_EN), language


def test_for_code_picks_catalog():
    assert Translator.for_code("NL").language == Language.NL


def test_for_code_unknown_language_uses_english():
    t = Translator.for_code("fr")

    assert t.language == Language.EN
    assert t("common.save") == "Save"
