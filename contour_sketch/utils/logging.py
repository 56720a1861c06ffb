"""
Logging configuration for the Contour Sketch converter.
"""

import logging
from pathlib import Path
from typing import List, Optional

# Handlers added by setup_logging, replaced on every call
_installed_handlers: List[logging.Handler] = []

def setup_logging(log_file: Optional[str] = None, level: int = logging.INFO) -> None:
    """
    Set up logging configuration.
    
    Args:
        log_file: Optional path to log file. If None, logs only to console
        level: Logging level (default: INFO)
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()
    
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    _installed_handlers.append(console_handler)
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        _installed_handlers.append(file_handler)
    
    for handler in _installed_handlers:
        root_logger.addHandler(handler)
    
    logging.getLogger("PIL").setLevel(logging.WARNING)
