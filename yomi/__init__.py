import os

# Get the base directory of the project (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Path to the data directory (assumes 'data' is at the same level as 'yomi')
DATA_DIR = os.path.join(BASE_DIR, '..', 'data')

DICTIONARIES_DIR = os.path.abspath(os.path.join(DATA_DIR, 'dictionaries'))

# Seed shipped with the package, used to build the system dictionary on first run
SEED_PATH = os.path.join(BASE_DIR, 'resources', 'system_seed.tsv')

# Named persistent stores
SYSTEM_DICTIONARY = "system"
LEARNING_DICTIONARY = "learning"
CONNECTION_DICTIONARY = "connection"
DICTIONARY_NAMES = [SYSTEM_DICTIONARY, LEARNING_DICTIONARY, CONNECTION_DICTIONARY]
