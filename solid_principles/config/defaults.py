"""Default configuration values.

String values of the form ``${VAR}`` or ``${VAR:default}`` are resolved from
the environment when the configuration is read. Settings with a dedicated
SOLID_* override variable are plain literals; see ConfigurationManager.
"""

DEFAULT_CONFIG = {
    "version": "1.0.0",
    "logging": {
        "level": "WARNING",
        "destination": "console",
        "file_path": "${SOLID_LOG_DIR:logs}/solid_principles.log",
        "max_size_mb": 10,
        "backup_count": 5,
        "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    },
    "notification": {
        "channel": "email",
    },
    "payment": {
        "default_type": "credit_card",
    },
}
