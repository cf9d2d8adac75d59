"""fqdncheck — validate host identifiers (FQDNs and IP literals)."""

__version__ = "0.1.0"
