"""
rekompenco.core — record type, append-only store, and shared infrastructure.

Modules:
    achievement  Immutable achievement record and its line format
    store        File-backed achievement store and the default instance
    paths        Platform application-data directory resolution
    config       Configuration loading (TOML + env vars)
    logging      Logging handler/formatter setup
    exceptions   Rekompenco exception hierarchy
    constants    File names, format limits, exit codes
"""
