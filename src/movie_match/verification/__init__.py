from .verifier import MetadataVerifier, normalize_title

__all__ = ["MetadataVerifier", "normalize_title"]
