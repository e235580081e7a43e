"""SSLContext factory for the Graylog client connection."""

import ssl

from graylog_shipper.config import GraylogConfig


def create_client_context_unverified() -> ssl.SSLContext:
    """Create an SSL context that skips certificate verification (dev use)."""
    ctx = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    return ctx


def create_client_context_verified(ca_file: str = "") -> ssl.SSLContext:
    """Verify the server cert against *ca_file*, or the platform trust store."""
    ctx = ssl.create_default_context(cafile=ca_file or None)
    ctx.minimum_version = ssl.TLSVersion.TLSv1_2
    return ctx


def create_client_context(config: GraylogConfig) -> ssl.SSLContext:
    """Build the context described by the config's TLS settings."""
    if config.verify_certs:
        ctx = create_client_context_verified(config.ca_file)
    else:
        ctx = create_client_context_unverified()
    if config.client_cert_file:
        ctx.load_cert_chain(
            certfile=config.client_cert_file,
            keyfile=config.client_key_file or None,
        )
    return ctx
