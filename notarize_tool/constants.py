"""Global constants for notarize-tool"""

# Application
APP_NAME = "notarize-tool"
LOG_FORMAT = "%(message)s"
PROJECT_CONFIG_FILE = ".notarize-tool.yaml"

# Inputs accepted from the hosting environment
INPUT_PRODUCT_PATH = "product-path"
INPUT_USERNAME = "appstore-connect-username"
INPUT_PASSWORD = "appstore-connect-password"
INPUT_API_KEY = "appstore-connect-api-key"
INPUT_API_KEY_ID = "appstore-connect-api-key-id"
INPUT_API_ISSUER = "appstore-connect-api-issuer"
INPUT_PRIMARY_BUNDLE_ID = "primary-bundle-id"
INPUT_VERBOSE = "verbose"
INPUT_WAIT_TIMEOUT = "wait-timeout"

ALL_INPUTS = [
    INPUT_PRODUCT_PATH,
    INPUT_USERNAME,
    INPUT_PASSWORD,
    INPUT_API_KEY,
    INPUT_API_KEY_ID,
    INPUT_API_ISSUER,
    INPUT_PRIMARY_BUNDLE_ID,
    INPUT_VERBOSE,
    INPUT_WAIT_TIMEOUT,
]

REQUIRED_INPUTS = [
    INPUT_PRODUCT_PATH,
    INPUT_API_KEY,
    INPUT_API_KEY_ID,
    INPUT_API_ISSUER,
]

# Outputs published on success
OUTPUT_PRODUCT_PATH = "product-path"

# External tools
ARCHIVE_TOOL = "ditto"
SUBMIT_TOOL = "xcrun"

# Workspace artifacts
WORKSPACE_PREFIX = "notarize-"
CREDENTIAL_FILE_NAME = "appstore-connect-api-key"
ARCHIVE_FILE_NAME = "archive.zip"
CREDENTIAL_FILE_MODE = 0o600

# Timeouts
NOTARYTOOL_TIMEOUT = "15m"
NOTARYTOOL_TIMEOUT_SECONDS = 15 * 60
WAIT_TIMEOUT_GRACE_SECONDS = 60
DEFAULT_WAIT_TIMEOUT = NOTARYTOOL_TIMEOUT_SECONDS + WAIT_TIMEOUT_GRACE_SECONDS

# Stream forwarding
READ_CHUNK_SIZE = 4096

# Reporter groups
GROUP_ARCHIVING = "Archiving Application"
GROUP_SUBMITTING = "Submitting for Notarizing"

# Environment variables
ENV_INPUT_PREFIX = "INPUT_"
ENV_GITHUB_ACTIONS = "GITHUB_ACTIONS"
ENV_GITHUB_OUTPUT = "GITHUB_OUTPUT"
ENV_CONFIG_PATH = "NOTARIZE_TOOL_CONFIG"

# Boolean string accepted for flags
TRUE_STRING = "true"


# Error codes
class ErrorCode:
    CONFIG_ERROR = "NT001"
    MISSING_INPUT = "NT002"
    PRODUCT_NOT_FOUND = "NT003"
    CREDENTIAL_WRITE_FAILED = "NT004"
    PACKAGING_FAILED = "NT005"
    PRECONDITION_FAILED = "NT006"
    SUBMISSION_FAILED = "NT007"
    SUBMISSION_TIMEOUT = "NT008"
    UNEXPECTED_ERROR = "NT009"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_ROCKET = "🚀"

# Messages templates
MSG_PACKAGING_FAILED = "Notarization failed"
MSG_UNEXPECTED_ERROR = "Notarization failed with an unexpected error: {message}"
MSG_ARCHIVE_CREATED = "Created application archive at {path}"
