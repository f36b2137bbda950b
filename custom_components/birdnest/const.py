DOMAIN = "birdnest"
STORAGE_KEY = "birdnest"
STORAGE_VERSION = 1
SAVE_DELAY = 1  # seconds; coalesces bursts of writes into one file write
SIGNAL_DOCUMENT_SAVED = f"{DOMAIN}_document_saved"

SERVICE_ADD_NOTE = "add_note"
SERVICE_REMOVE_NOTE = "remove_note"
SERVICE_SET_DAY_PARENT = "set_day_parent"
SERVICE_RESET_CLEANING = "reset_cleaning"

# Document keys inside the storage file
KEY_SETTINGS = "settings"
KEY_SETTINGS_MIGRATED = "settings_migrated"
KEY_CALENDAR = "calendar"
KEY_NOTES = "notes"
KEY_TRANSFER_CHILD1 = "transfer_child1"
KEY_TRANSFER_CHILD2 = "transfer_child2"
KEY_TRANSFER_PETS = "transfer_pets"
KEY_HOUSE_NOTES = "house_notes"
KEY_CLEANING = "cleaning_tasks"

# Settings keys
K_PARENT_A = "parentA"
K_PARENT_B = "parentB"
K_CHILD_1 = "child1"
K_CHILD_2 = "child2"

DEFAULT_SETTINGS = {
    K_PARENT_A: "Iris",
    K_PARENT_B: "Koen",
    K_CHILD_1: "Kind 1",
    K_CHILD_2: "Kind 2",
}

# Checklist item / note keys
K_ID = "id"
K_TEXT = "text"
K_CHECKED = "checked"
K_DATE = "date"
K_CREATED = "created"

SLOT_A = "A"
SLOT_B = "B"
SLOTS = (SLOT_A, SLOT_B)
SLOT_NONE = "none"

DATE_FMT = "%Y-%m-%d"
DAY_LABELS = ["Ma", "Di", "Wo", "Do", "Vr", "Za", "Zo"]

EMPTY_NOTES = "Nog geen notities."
EMPTY_TRANSFER = "Geen notities."
EMPTY_HOUSE = "Geen notities over het huis."
EMPTY_CLEANING = "Geen schoonmaaktaken."

# key -> placeholder shown when the list is empty
CHECKLISTS = {
    KEY_TRANSFER_CHILD1: EMPTY_TRANSFER,
    KEY_TRANSFER_CHILD2: EMPTY_TRANSFER,
    KEY_TRANSFER_PETS: EMPTY_TRANSFER,
    KEY_HOUSE_NOTES: EMPTY_HOUSE,
}

DEFAULT_CLEANING_TASKS = [
    "Stofzuigen woonkamer",
    "Stofzuigen slaapkamers",
    "Dweilen vloeren",
    "Keuken aanrecht & kookplaat schoonmaken",
    "Afwas / vaatwasser in- en uitruimen",
    "Badkamer schoonmaken (douche, wastafel, toilet)",
    "Toilet schoonmaken",
    "Prullenbakken legen",
    "Wasgoed wassen, drogen en opvouwen",
    "Bedden verschonen",
    "Spiegels en glazen oppervlakken schoonmaken",
    "Eettafel afnemen",
    "Koelkast check (verlopen producten)",
]
