import logging

def setup_logger(level: str = "INFO") -> None:
    """Set up the root logger for command line use."""
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, level.upper(), logging.INFO)
    )
