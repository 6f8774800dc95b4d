"""Constants for the UTR player search client."""

# Upstream service
UTR_BASE_URL = 'https://app.universaltennis.com/api'
SEARCH_PLAYERS_PATH = '/v2/search/players?query={query}'
PLAYER_PROFILE_PATH = '/v1/player/{player_id}'
PLAYER_RESULTS_PATH = '/v1/player/{player_id}/results'

# Upstream dates look like 2023-06-10T00:00:00
DATE_INPUT_FORMAT = '%Y-%m-%dT%H:%M:%S'
DATE_DISPLAY_FORMAT = '%m/%d/%Y'

# Search prompt
SEARCH_PLACEHOLDER = 'Player name'
DEFAULT_CHAR_LIMIT = 156

# List geometry before the first resize event arrives
DEFAULT_LIST_WIDTH = 80
DEFAULT_LIST_HEIGHT = 16
EVENT_ROW_SPACING = 1
# Lines around a list: title bar, status line, blank, then blank + pagination
# and blank + help below it
LIST_CHROME_LINES = 7

# Key names as reported by the terminal layer
KEY_ENTER = 'enter'
KEY_ESCAPE = 'escape'
KEY_QUIT = 'ctrl+c'

LIST_UP_KEYS = {'up', 'k'}
LIST_DOWN_KEYS = {'down', 'j'}
LIST_PREV_PAGE_KEYS = {'left', 'h', 'pageup'}
LIST_NEXT_PAGE_KEYS = {'right', 'l', 'pagedown'}
LIST_START_KEYS = {'home', 'g'}
LIST_END_KEYS = {'end', 'G', 'shift+g'}

# User-facing messages
NO_PLAYER_FOUND = 'No player found.'
SEARCH_HEADING = 'Search for a player by name'
SEARCH_HELP = '(enter to search, esc to quit)'
SELECT_TITLE = 'Select a player'
RESULTS_TITLE_SUFFIX = "'s Match Results"
LIST_HELP = '↑/k up • ↓/j down • ←/→ page • enter select • esc back • ctrl+c quit'
RESULTS_HELP = '↑/k up • ↓/j down • ←/→ page • esc back • ctrl+c quit'

# Default colors
SELECTED_COLOR = '#25CCF7'
SUCCESS_COLOR = '#0be881'
FAILURE_COLOR = '#f53b57'
TITLE_FG_COLOR = '#FAFAFA'
TITLE_BG_COLOR = '#7D56F4'
