# API Route Constants

# Base API
API_BASE = '/api'

# Event routes
EVENT_BASE = f'{API_BASE}/event'
EVENT_CREATE = f'{EVENT_BASE}/create'
EVENT_LIST = f'{EVENT_BASE}/list'
EVENT_MY_EVENTS = f'{EVENT_BASE}/my-events'
EVENT_UPLOAD_IMAGE = f'{EVENT_BASE}/upload-image'
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_UPDATE = f'{EVENT_BASE}/{{event_id}}'
EVENT_UPDATE_STATUS = f'{EVENT_BASE}/{{event_id}}/status'
