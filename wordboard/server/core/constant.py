"""Constants shared by the HTTP layer."""

PROJECT_NAME = "wordboard"
API_V1_STR = "/api/v1"
SCHEMA_VERSION = "v1"

SCRABBLE_BOARDS_PATH = "/scrabble-boards"
WORD_PLAY_BOARDS_PATH = "/word-play-boards"

# Requests slower than this are logged as warnings.
SLOW_REQUEST_THRESHOLD_MS = 1000
