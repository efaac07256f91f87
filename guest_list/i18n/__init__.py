from guest_list.i18n.translator import Translator

__all__ = ["Translator"]
