import logging


def setup_logging(log_level: str = "INFO"):
    """Configure root logging for scripts that use the SmarterU client.

    Failed requests are logged with ``request`` and ``response`` attributes
    attached to the record. The default format does not print them; pass a
    handler with a custom formatter to surface them.
    """
    logging.basicConfig(
        level=getattr(logging, log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return logging.getLogger("smarteru")
