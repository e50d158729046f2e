"""Constants for the RPC Optimizer."""

# Default configuration values
DEFAULT_CACHE_TTL = 300
CHAINLIST_CACHE_TTL = 30 * 60
DEFAULT_SAMPLES = 5
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_FASTEST_TIMEOUT_MS = 3000
DEFAULT_SAMPLE_DELAY_MS = 100
DEFAULT_SERVER_HOST = "0.0.0.0"
DEFAULT_SERVER_PORT = 11600

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "uvicorn": "WARNING",
    "uvicorn.access": "WARNING",
    "fastapi": "WARNING",
    "httpx": "WARNING",
    "httpcore": "WARNING"
}

# HTTP status codes
HTTP_BAD_REQUEST = 400
HTTP_NOT_FOUND = 404
HTTP_BAD_GATEWAY = 502

# HTTP headers
CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_TYPE_JSON = "application/json"
ACCEPT_HEADER = "Accept"

# JSON-RPC field names
JSONRPC_FIELD = "jsonrpc"
METHOD_FIELD = "method"
PARAMS_FIELD = "params"
ID_FIELD = "id"
RESULT_FIELD = "result"
ERROR_FIELD = "error"
MESSAGE_FIELD = "message"
JSONRPC_VERSION = "2.0"

# JSON-RPC methods
EVM_BLOCK_NUMBER_METHOD = "eth_blockNumber"
SOLANA_SLOT_METHOD = "getSlot"

# Probe error messages
TIMEOUT_ERROR = "Timeout"
RPC_ERROR_FALLBACK = "RPC error"
HEX_PREFIX = "0x"

# Dynamic endpoint source
CHAINLIST_URL = "https://chainid.network/chains.json"
CHAINLIST_REQUEST_TIMEOUT_MS = 15000
REJECTED_URL_MARKERS = ("${", "API_KEY", "INFURA", "ALCHEMY")
UNKNOWN_PROVIDER = "Unknown"

# Config file
CONFIG_FILE_NAME = "config.json"

# FastAPI app constants
APP_TITLE = "RPC Optimizer"
APP_DESCRIPTION = "Benchmarks blockchain JSON-RPC endpoints and recommends the best one per network"
APP_VERSION = "1.0.0"

# CLI
CLI_PROG = "rpc-optimizer"
CLI_DESCRIPTION = "Find the fastest RPC endpoints for your crypto trades"
