"""
Configuration constants for the DocLock application.
"""

import os

# Application Metadata
APP_VERSION = "1.0"  # Use: Current version of the application. Type: str. Range: Semantic versioning string (e.g., "1.0.0")
APP_NAME = "TCG Document Lock"  # Use: Full name of the application. Type: str. Range: Any valid string.
APP_TITLE_PREFIX = f"{APP_NAME} v{APP_VERSION}"  # Use: Prefix for the application window titles, combining name and version. Type: str (f-string). Range: Derived from APP_NAME and APP_VERSION.

# File and Directory Names
CONFIG_DIR_NAME = ".doclock"  # Use: Name of the hidden directory within the user's home directory that holds the vault. Type: str. Range: Any valid directory name.
PASSWORD_HASH_FILE = "password.hash"  # Use: Filename of the credential record (one hex SHA-256 digest). Type: str. Range: Any valid filename.
STORED_ITEMS_FILE = "stored_items.json"  # Use: Filename of the JSON catalog document. Type: str. Range: Any valid filename.
TEMP_FILE_SUFFIX = ".tmp"  # Use: Suffix of the sibling file written before replacing a data file. Type: str. Range: Any non-empty string.
COPY_CHUNK_SIZE = 1024 * 1024  # Use: Bytes read per step when copying an attachment into the vault. Type: int. Range: Positive integer.

# Environment Variables
VAULT_DIR_ENV = "DOCLOCK_HOME"  # Use: Environment variable overriding the vault directory. Type: str. Range: Any valid environment variable name.
LOG_LEVEL_ENV = "DOCLOCK_LOG_LEVEL"  # Use: Environment variable overriding the log level. Type: str. Range: Any valid environment variable name.
LOG_LEVEL_DEFAULT = "INFO"  # Use: Log level when LOG_LEVEL_ENV is unset. Type: str. Range: DEBUG, INFO, WARNING, ERROR, CRITICAL.
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'  # Use: Format string passed to logging.basicConfig. Type: str. Range: Any valid logging format string.

# Security Settings
DIGEST_HEX_LENGTH = 64  # Use: Length of a hex encoded SHA-256 digest. Type: int. Range: 64.

# Item Settings
WEBSITE_URL_PATTERN = r'^https?://[\w\-]+(\.[\w\-]+)+[/#?]?.*$'  # Use: Pattern a Website item's content must match. Type: str (regex). Range: Any valid regular expression.
PHOTO_FILE_FILTER = "Images (*.png *.jpg *.jpeg *.gif *.bmp *.webp *.heic)"  # Use: QFileDialog filter for Photo items. Type: str. Range: Valid Qt name filter.
DOCUMENT_FILE_FILTER = "All Files (*)"  # Use: QFileDialog filter for Document items. Type: str. Range: Valid Qt name filter.

# UI Settings
APP_STYLE = 'Fusion'  # Use: PyQt5 application style. Type: str. Range: Valid PyQt5 style names (e.g., 'Fusion', 'Windows', 'Macintosh').
DISPLAY_DATE_FORMAT = "%b %d, %Y %I:%M %p"  # Use: strftime format used to show stored dates. Type: str. Range: Any valid strftime format.
TABLE_PASSWORD_HIDDEN_TEXT = "••••••••"  # Use: Placeholder text displayed in the UI table for Password items. Type: str. Range: Any string.
CONTENT_PREVIEW_LENGTH = 50  # Use: Number of content characters shown in the item table before truncation. Type: int. Range: Positive integer.
MAIN_WINDOW_SIZE = (900, 600)  # Use: Initial width and height of the main window. Type: tuple[int, int]. Range: Positive integers.


def get_vault_dir() -> str:
    """Return the vault directory, honouring the DOCLOCK_HOME override."""
    override = os.environ.get(VAULT_DIR_ENV, "").strip()
    if override:
        return os.path.abspath(os.path.expanduser(override))
    return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
