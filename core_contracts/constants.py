"""Constants shared by DTOs and HTTP clients: API routes, headers, value types."""
from __future__ import annotations

# ---------------------------------------------------------------------------
# API version and routes
# ---------------------------------------------------------------------------
API_VERSION = "v2"
API_BASE = "/api/v2"

API_CONFIG_ROUTE = f"{API_BASE}/config"
API_METRICS_ROUTE = f"{API_BASE}/metrics"
API_PING_ROUTE = f"{API_BASE}/ping"
API_VERSION_ROUTE = f"{API_BASE}/version"
API_SECRET_ROUTE = f"{API_BASE}/secret"

API_EVENT_ROUTE = f"{API_BASE}/event"
API_ALL_EVENT_ROUTE = f"{API_EVENT_ROUTE}/all"
API_EVENT_COUNT_ROUTE = f"{API_EVENT_ROUTE}/count"
API_EVENT_COUNT_BY_DEVICE_NAME_ROUTE = f"{API_EVENT_COUNT_ROUTE}/device/name"
API_EVENT_BY_DEVICE_NAME_ROUTE = f"{API_EVENT_ROUTE}/device/name"
API_EVENT_BY_AGE_ROUTE = f"{API_EVENT_ROUTE}/age"

API_READING_ROUTE = f"{API_BASE}/reading"
API_ALL_READING_ROUTE = f"{API_READING_ROUTE}/all"
API_READING_COUNT_ROUTE = f"{API_READING_ROUTE}/count"
API_READING_COUNT_BY_DEVICE_NAME_ROUTE = f"{API_READING_COUNT_ROUTE}/device/name"
API_READING_BY_DEVICE_NAME_ROUTE = f"{API_READING_ROUTE}/device/name"
API_READING_BY_RESOURCE_NAME_ROUTE = f"{API_READING_ROUTE}/resourceName"

API_DEVICE_SERVICE_ROUTE = f"{API_BASE}/deviceservice"
API_ALL_DEVICE_SERVICE_ROUTE = f"{API_DEVICE_SERVICE_ROUTE}/all"
API_DEVICE_SERVICE_BY_NAME_ROUTE = f"{API_DEVICE_SERVICE_ROUTE}/name"

API_DEVICE_PROFILE_ROUTE = f"{API_BASE}/deviceprofile"
API_DEVICE_PROFILE_UPLOAD_FILE_ROUTE = f"{API_DEVICE_PROFILE_ROUTE}/uploadfile"
API_ALL_DEVICE_PROFILE_ROUTE = f"{API_DEVICE_PROFILE_ROUTE}/all"
API_DEVICE_PROFILE_BY_NAME_ROUTE = f"{API_DEVICE_PROFILE_ROUTE}/name"

API_PROVISION_WATCHER_ROUTE = f"{API_BASE}/provisionwatcher"
API_ALL_PROVISION_WATCHER_ROUTE = f"{API_PROVISION_WATCHER_ROUTE}/all"
API_PROVISION_WATCHER_BY_NAME_ROUTE = f"{API_PROVISION_WATCHER_ROUTE}/name"
API_PROVISION_WATCHER_BY_PROFILE_NAME_ROUTE = f"{API_PROVISION_WATCHER_ROUTE}/profile/name"
API_PROVISION_WATCHER_BY_SERVICE_NAME_ROUTE = f"{API_PROVISION_WATCHER_ROUTE}/service/name"

API_SUBSCRIPTION_ROUTE = f"{API_BASE}/subscription"
API_ALL_SUBSCRIPTION_ROUTE = f"{API_SUBSCRIPTION_ROUTE}/all"
API_SUBSCRIPTION_BY_NAME_ROUTE = f"{API_SUBSCRIPTION_ROUTE}/name"
API_SUBSCRIPTION_BY_CATEGORY_ROUTE = f"{API_SUBSCRIPTION_ROUTE}/category"
API_SUBSCRIPTION_BY_LABEL_ROUTE = f"{API_SUBSCRIPTION_ROUTE}/label"
API_SUBSCRIPTION_BY_RECEIVER_ROUTE = f"{API_SUBSCRIPTION_ROUTE}/receiver"

# Path segments used to build the parameterised routes above
START = "start"
END = "end"
RESOURCE_NAME = "resourceName"

# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------
OFFSET = "offset"
LIMIT = "limit"
LABELS = "labels"
COMMA_SEPARATOR = ","

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 20

# ---------------------------------------------------------------------------
# Headers and content types
# ---------------------------------------------------------------------------
CORRELATION_HEADER = "X-Correlation-ID"
CONTENT_TYPE = "Content-Type"

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_CBOR = "application/cbor"
CONTENT_TYPE_YAML = "application/x-yaml"
CONTENT_TYPE_TEXT = "text/plain"

# Form field name the metadata service expects for uploaded profile files
FILE_FORM_FIELD = "file"

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------
ENV_ENCODE_ALL_EVENTS = "EDGEX_ENCODE_ALL_EVENTS"

# ---------------------------------------------------------------------------
# Reading value types
# ---------------------------------------------------------------------------
VALUE_TYPE_BOOL = "Bool"
VALUE_TYPE_STRING = "String"
VALUE_TYPE_UINT8 = "Uint8"
VALUE_TYPE_UINT16 = "Uint16"
VALUE_TYPE_UINT32 = "Uint32"
VALUE_TYPE_UINT64 = "Uint64"
VALUE_TYPE_INT8 = "Int8"
VALUE_TYPE_INT16 = "Int16"
VALUE_TYPE_INT32 = "Int32"
VALUE_TYPE_INT64 = "Int64"
VALUE_TYPE_FLOAT32 = "Float32"
VALUE_TYPE_FLOAT64 = "Float64"
VALUE_TYPE_BINARY = "Binary"
VALUE_TYPE_BOOL_ARRAY = "BoolArray"
VALUE_TYPE_STRING_ARRAY = "StringArray"
VALUE_TYPE_UINT8_ARRAY = "Uint8Array"
VALUE_TYPE_UINT16_ARRAY = "Uint16Array"
VALUE_TYPE_UINT32_ARRAY = "Uint32Array"
VALUE_TYPE_UINT64_ARRAY = "Uint64Array"
VALUE_TYPE_INT8_ARRAY = "Int8Array"
VALUE_TYPE_INT16_ARRAY = "Int16Array"
VALUE_TYPE_INT32_ARRAY = "Int32Array"
VALUE_TYPE_INT64_ARRAY = "Int64Array"
VALUE_TYPE_FLOAT32_ARRAY = "Float32Array"
VALUE_TYPE_FLOAT64_ARRAY = "Float64Array"

VALUE_TYPES = (
    VALUE_TYPE_BOOL,
    VALUE_TYPE_STRING,
    VALUE_TYPE_UINT8,
    VALUE_TYPE_UINT16,
    VALUE_TYPE_UINT32,
    VALUE_TYPE_UINT64,
    VALUE_TYPE_INT8,
    VALUE_TYPE_INT16,
    VALUE_TYPE_INT32,
    VALUE_TYPE_INT64,
    VALUE_TYPE_FLOAT32,
    VALUE_TYPE_FLOAT64,
    VALUE_TYPE_BINARY,
    VALUE_TYPE_BOOL_ARRAY,
    VALUE_TYPE_STRING_ARRAY,
    VALUE_TYPE_UINT8_ARRAY,
    VALUE_TYPE_UINT16_ARRAY,
    VALUE_TYPE_UINT32_ARRAY,
    VALUE_TYPE_UINT64_ARRAY,
    VALUE_TYPE_INT8_ARRAY,
    VALUE_TYPE_INT16_ARRAY,
    VALUE_TYPE_INT32_ARRAY,
    VALUE_TYPE_INT64_ARRAY,
    VALUE_TYPE_FLOAT32_ARRAY,
    VALUE_TYPE_FLOAT64_ARRAY,
)

# ---------------------------------------------------------------------------
# Notification channels and resource access
# ---------------------------------------------------------------------------
REST = "REST"
MQTT = "MQTT"
EMAIL = "EMAIL"

READ_WRITE_R = "R"
READ_WRITE_W = "W"
READ_WRITE_RW = "RW"

HTTP_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT")
