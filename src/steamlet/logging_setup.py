import logging
import sys

def setup_logging(verbose: bool = False) -> None:
    """Diagnostics go to stderr so stdout only carries what the user asked for."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
