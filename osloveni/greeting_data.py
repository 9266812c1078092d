# ═════════════════════════════════════════════════════════════════════════════════
# GREETING LOOKUP TABLES
# ═════════════════════════════════════════════════════════════════════════════════
#
# Static data for gender classification and Czech vocative declension.
# Everything here is frozen at import time:
# 1. GIVEN NAMES: curated male/female first names (English + Czech)
# 2. SURNAME ENDINGS: Czech gender signals and "looks Czech" patterns
# 3. DECLENSION: ordered suffix rules and the exact-match special cases
# 4. SALUTATIONS: honorifics, adjective agreement and generic fallbacks
# ═════════════════════════════════════════════════════════════════════════════════

from types import MappingProxyType

# ═════════════════════════════════════════════════════════════════════════════════
# GIVEN NAMES
# ═════════════════════════════════════════════════════════════════════════════════

ENGLISH_MALE_NAMES = frozenset(
    {
        "james",
        "john",
        "robert",
        "michael",
        "william",
        "david",
        "richard",
        "charles",
        "joseph",
        "thomas",
        "christopher",
        "daniel",
        "paul",
        "mark",
        "donald",
        "steven",
        "andrew",
        "kenneth",
        "joshua",
        "kevin",
        "brian",
        "george",
        "timothy",
        "ronald",
        "jason",
        "edward",
        "jeffrey",
        "ryan",
        "jacob",
        "gary",
        "nicholas",
        "eric",
        "jonathan",
        "stephen",
        "larry",
        "justin",
        "scott",
        "brandon",
        "benjamin",
        "samuel",
    }
)

CZECH_MALE_NAMES = frozenset(
    {
        "jan",
        "petr",
        "josef",
        "pavel",
        "tomáš",
        "jaroslav",
        "martin",
        "miroslav",
        "jiří",
        "václav",
        "zdeněk",
        "stanislav",
        "karel",
        "vladimír",
        "jakub",
        "františek",
        "milan",
        "lubomír",
        "ondřej",
        "michal",
        "daniel",
        "david",
        "adam",
        "lukáš",
        "marek",
        "roman",
        "vojtěch",
        "antonín",
        "radek",
        "aleš",
        "matěj",
        "filip",
        "patrik",
        "šimon",
        "dominik",
        "richard",
        "robert",
        "marcel",
        "nikolas",
        "sebastián",
    }
)

ENGLISH_FEMALE_NAMES = frozenset(
    {
        "mary",
        "patricia",
        "jennifer",
        "linda",
        "elizabeth",
        "barbara",
        "susan",
        "jessica",
        "sarah",
        "karen",
        "nancy",
        "lisa",
        "betty",
        "helen",
        "sandra",
        "donna",
        "carol",
        "ruth",
        "sharon",
        "michelle",
        "laura",
        "kimberly",
        "deborah",
        "dorothy",
    }
)

CZECH_FEMALE_NAMES = frozenset(
    {
        "marie",
        "jana",
        "eva",
        "anna",
        "věra",
        "alena",
        "lenka",
        "kateřina",
        "lucie",
        "helena",
        "jitka",
        "martina",
        "zuzana",
        "jaroslava",
        "petra",
        "božena",
        "hana",
        "jiřina",
        "růžena",
        "vlasta",
        "tereza",
        "veronika",
        "barbora",
        "klára",
        "adéla",
        "natálie",
        "nikola",  # feminine in Czech usage
        "kristýna",
        "simona",
        "michaela",
        "daniela",
        "andrea",
        "monika",
        "ivana",
        "šárka",
        "marcela",
        "renata",
        "dagmar",  # no vowel ending, needs the list
        "zdenka",
        "milada",
        "vladimíra",
        "kamila",
        "ludmila",
        "anežka",
        "františka",
        "olga",
        "irena",
        "libuše",
        "emilie",
        "julie",
        "radka",
        "pavla",
        "gabriela",
        "jarmila",
        "silva",
        "naděžda",
        "stanislava",
        "blanka",
    }
)

MALE_NAMES = ENGLISH_MALE_NAMES | CZECH_MALE_NAMES
FEMALE_NAMES = ENGLISH_FEMALE_NAMES | CZECH_FEMALE_NAMES

# First-name ending heuristics, used only after the exact lookups miss
CZECH_FEMALE_GIVEN_ENDINGS = ("a", "ie")
CZECH_FEMALE_E_ENDING_MIN_LENGTH = 4  # "e" counts only for names longer than 3 chars
ENGLISH_FEMALE_GIVEN_ENDINGS = ("a", "ia", "ina", "lyn")

# ═════════════════════════════════════════════════════════════════════════════════
# SURNAME ENDINGS
# ═════════════════════════════════════════════════════════════════════════════════

# Female endings are checked first: "-ová" is unambiguous
CZECH_FEMALE_SURNAME_ENDINGS = ("ová", "ná", "ská", "cká")

CZECH_MALE_SURNAME_ENDINGS = ("ák", "ek", "ík", "ný", "ský", "cký", "ec", "an", "el", "os", "ur", "ej")

LIKELY_CZECH_SURNAME_ENDINGS = ("ová", "ák", "ek", "ný", "ský", "cký", "ec", "íček", "oš", "kí", "ích")

# ═════════════════════════════════════════════════════════════════════════════════
# VOCATIVE DECLENSION
# ═════════════════════════════════════════════════════════════════════════════════
#
# Records are (match_suffix, replacement, precedence_group). Lower groups win.
# A record whose replacement equals its suffix leaves the surname unchanged.
#
# Group 1: -a stems ("předseda" type)
# Group 2: hard multi-letter endings, before the generic consonant rule
# Group 3: movable -e-
# Group 4: soft consonants
# Group 5: adjectival surnames, never declined
# Group 6: foreign / pronominal endings, never declined
# Group 7: remaining hard consonants ("pán" type)

A_STEM_RULES = (("a", "o", 1),)

HARD_ENDING_RULES = (
    ("ák", "áku", 2),
    ("ík", "íku", 2),
    ("ék", "éku", 2),
    ("ók", "óku", 2),
    ("ůk", "ůku", 2),
    ("uch", "uchu", 2),
    ("ach", "achu", 2),
    ("oh", "ohu", 2),
    ("ah", "ahu", 2),
)

MOVABLE_E_RULES = (
    ("ec", "če", 3),  # Němec -> Němče
    ("el", "le", 3),  # Menzel -> Menzle
)

SOFT_CONSONANT_RULES = (
    ("š", "ši", 4),
    ("ž", "ži", 4),
    ("č", "či", 4),
    ("ř", "ři", 4),
    ("ň", "ni", 4),
    ("ď", "di", 4),
    ("ť", "ti", 4),
    ("j", "ji", 4),
    ("c", "ci", 4),
)

ADJECTIVE_RULES = (
    ("tský", "tský", 5),
    ("dský", "dský", 5),
    ("ský", "ský", 5),
    ("cký", "cký", 5),
    ("ný", "ný", 5),
)

FOREIGN_ENDING_RULES = (
    ("i", "i", 6),
    ("y", "y", 6),
)

GENERIC_HARD_CONSONANT_RULES = tuple(
    (consonant, consonant + "e", 7) for consonant in ("b", "f", "l", "m", "p", "s", "v", "z", "d", "n", "r", "t")
)

DECLENSION_RULE_RECORDS = (
    A_STEM_RULES
    + HARD_ENDING_RULES
    + MOVABLE_E_RULES
    + SOFT_CONSONANT_RULES
    + ADJECTIVE_RULES
    + FOREIGN_ENDING_RULES
    + GENERIC_HARD_CONSONANT_RULES
)

# Exact-match overrides, consulted before any suffix rule.
# Several entries disagree with the rules on purpose (daniel, marek, františek):
# greetings already sent with these forms must stay stable.
VOCATIVE_SPECIAL_CASES = {
    # Common surnames
    "novák": "nováku",
    "svoboda": "svobodo",
    "dvořák": "dvořáku",
    "černý": "černý",
    "procházka": "procházko",
    "krejčí": "krejčí",
    "horák": "horáku",
    "němec": "němče",
    "moravec": "moravče",
    "urban": "urbane",
    "fiala": "fialo",
    "veselý": "veselý",
    "pokorný": "pokorný",
    "novotný": "novotný",
    # Given names that also occur as surnames
    "štěpán": "štěpáne",
    "jan": "jane",
    "petr": "petre",
    "pavel": "pavle",
    "tomáš": "tomáši",
    "jiří": "jiří",
    "josef": "josefe",
    "václav": "václave",
    "martin": "martine",
    "jaroslav": "jaroslave",
    "miroslav": "miroslave",
    "milan": "milane",
    "karel": "karle",
    "antonín": "antoníne",
    "františek": "františku",
    "david": "davide",
    "daniel": "danieli",
    "michal": "michale",
    "lukáš": "lukáši",
    "jakub": "jakube",
    "ondřej": "ondřeji",
    "adam": "adame",
    "marek": "marku",
    "patrik": "patriku",
    "dominik": "dominiku",
}

# ═════════════════════════════════════════════════════════════════════════════════
# SALUTATIONS
# ═════════════════════════════════════════════════════════════════════════════════

CZECH_HONORIFICS = {"male": "pane", "female": "paní"}
CZECH_DEAR = {"male": "Vážený", "female": "Vážená"}
CZECH_GENERIC_GREETING = "Vážený hosté"

ENGLISH_HONORIFICS = {"male": "Mr.", "female": "Ms."}
ENGLISH_NEUTRAL_HONORIFIC = "Mr./Ms."
ENGLISH_DEAR = "Dear"
ENGLISH_GENERIC_GREETING = "Dear Guest"

# Words that mark an existing salutation as Czech
CZECH_SALUTATION_WORDS = frozenset({"vážený", "vážená", "milý", "milá", "drahý", "drahá"})

OPTION_DESCRIPTIONS = {
    "czech": {"formal": "Formální oslovení", "informal": "Neformální oslovení"},
    "english": {"formal": "Formal address", "informal": "Informal address"},
}

# Freeze mappings to prevent accidental mutation
VOCATIVE_SPECIAL_CASES = MappingProxyType(VOCATIVE_SPECIAL_CASES)
CZECH_HONORIFICS = MappingProxyType(CZECH_HONORIFICS)
CZECH_DEAR = MappingProxyType(CZECH_DEAR)
ENGLISH_HONORIFICS = MappingProxyType(ENGLISH_HONORIFICS)
OPTION_DESCRIPTIONS = MappingProxyType({k: MappingProxyType(v) for k, v in OPTION_DESCRIPTIONS.items()})
