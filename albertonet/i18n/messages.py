from albertonet.i18n.en import en
from albertonet.i18n.es import es

DEFAULT_LOCALE = "en"

languages = {
    "es": "Español",
    "en": "English",
}

messages = {
    "en": en,
    "es": es,
}
