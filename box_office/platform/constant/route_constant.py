# API Route Constants

# Base API
API_BASE = '/api'

# Ticket routes
TICKET_BASE = f'{API_BASE}/ticket'
TICKET_LIST_BY_SHOW = f'{TICKET_BASE}/show/{{show_id}}'
TICKET_RESERVE = f'{TICKET_BASE}/{{ticket_id}}/reserve'
TICKET_SELL = f'{TICKET_BASE}/{{ticket_id}}/sell'
TICKET_RELEASE = f'{TICKET_BASE}/{{ticket_id}}/release'
TICKET_CANCEL = f'{TICKET_BASE}/{{ticket_id}}/cancel'
TICKET_RESET = f'{TICKET_BASE}/{{ticket_id}}/reset'
TICKET_CHANGE_CATEGORY = f'{TICKET_BASE}/{{ticket_id}}/category'
TICKET_BULK_RESERVE = f'{TICKET_BASE}/bulk-reserve'
TICKET_BULK_SELL = f'{TICKET_BASE}/bulk-sell'
TICKET_CHECKIN = f'{TICKET_BASE}/checkin'

# Show routes
SHOW_BASE = f'{API_BASE}/show'
SHOW_INITIALIZE_TICKETS = f'{SHOW_BASE}/{{show_id}}/initialize-tickets'
SHOW_CATEGORY_CREATE = f'{SHOW_BASE}/{{show_id}}/categories'
SHOW_CATEGORY_UPDATE = f'{SHOW_BASE}/{{show_id}}/categories/{{category_id}}'
SHOW_SEAT_MAP = f'{SHOW_BASE}/{{show_id}}/seat-map'
SHOW_SUMMARY = f'{SHOW_BASE}/{{show_id}}/summary'
SHOW_ATTENDANCE = f'{SHOW_BASE}/{{show_id}}/attendance'
SHOW_AUDIENCE = f'{SHOW_BASE}/{{show_id}}/audience'

# Actor headers, set by the upstream auth layer
ACTOR_ID_HEADER = 'X-Actor-Id'
ACTOR_ROLE_HEADER = 'X-Actor-Role'
