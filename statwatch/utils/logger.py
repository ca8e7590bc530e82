# statwatch/utils/logger.py
import os
import logging
import sys
from logging.handlers import RotatingFileHandler

class LoggerSetup:
    """
    Centralized logging configuration for statwatch.
    Console output carries INFO and above, a rotating file keeps DEBUG history.

    The monitor's own report lines (threshold warnings, poll failures) are not
    routed through here; these loggers are for operational diagnostics.
    """
    _initialized = False
    _default_logs_dir = 'logs'

    @classmethod
    def _get_logs_dir(cls) -> str:
        """STATWATCH_LOG_DIR, else logs/ under the working directory"""
        return os.path.abspath(os.getenv('STATWATCH_LOG_DIR') or cls._default_logs_dir)

    @classmethod
    def _get_log_path(cls, name: str) -> str:
        """
        Generate a log file path based on the name.
        Module paths use their last component, class names are used as is.
        """
        if '.' in name:
            filename = f"{name.split('.')[-1]}.log"
        else:
            filename = f"{name}.log"

        return os.path.join(cls._get_logs_dir(), filename)

    @classmethod
    def setup(cls, name: str) -> logging.Logger:
        """
        Set up and return a logger.
        Args:
            name: Logger name (__name__ for modules or __class__.__name__ for classes)
        Returns:
            logging.Logger: Configured logger instance
        Example:
            from statwatch.utils.logger import LoggerSetup
            logger = LoggerSetup.setup(__name__)
        """
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)

        # Avoid adding handlers multiple times
        if not logger.handlers:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.INFO)
            console_formatter = logging.Formatter(
                '%(asctime)s - %(levelname)s - %(message)s'
            )
            console_handler.setFormatter(console_formatter)
            logger.addHandler(console_handler)

            # Only add file handler if not in test environment
            if "pytest" not in sys.modules:
                try:
                    debug_log_file = cls._get_log_path(name)
                    os.makedirs(os.path.dirname(debug_log_file), exist_ok=True)

                    file_handler = RotatingFileHandler(
                        debug_log_file,
                        maxBytes=10*1024*1024,  # 10MB per file
                        backupCount=5,
                        encoding='utf-8'
                    )
                    file_handler.setLevel(logging.DEBUG)
                    file_formatter = logging.Formatter(
                        '%(asctime)s - %(threadName)s - %(levelname)s - [%(name)s] - %(message)s'
                    )
                    file_handler.setFormatter(file_formatter)
                    logger.addHandler(file_handler)
                except (PermissionError, OSError) as e:
                    # Log to console if file logging fails
                    console_handler.setLevel(logging.DEBUG)
                    logger.warning(f"Could not set up file logging: {str(e)}")

        if not cls._initialized:
            # Quiet noisy loggers
            logging.getLogger('aiohttp').setLevel(logging.WARNING)
            logging.getLogger('asyncio').setLevel(logging.WARNING)
            cls._initialized = True

        return logger
