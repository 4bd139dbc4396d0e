"""Decide whether a route goes into the generated document."""

from api_spec_scanner.config import ScanConfig

from .pattern import matches_any


def should_include_paths(paths, config: ScanConfig) -> bool:
    """Exclude patterns win; then at least one include must match, if any are set."""
    if config.exclude_path_patterns and any(matches_any(config.exclude_path_patterns, p) for p in paths):
        return False
    if config.include_path_patterns:
        return any(matches_any(config.include_path_patterns, p) for p in paths)
    return True


def should_include_methods(methods, config: ScanConfig) -> bool:
    methods = set(methods)
    if config.include_http_methods and not methods & config.include_http_methods:
        return False
    return not methods & config.exclude_http_methods


def should_include(paths, methods, config: ScanConfig) -> bool:
    """Path and method checks, then the custom predicate as a veto.

    The predicate sees the first path in registry order, or "" when the
    route has none.
    """
    paths = list(paths)
    if not should_include_paths(paths, config) or not should_include_methods(methods, config):
        return False
    if config.custom_endpoint_filter is not None:
        return bool(config.custom_endpoint_filter(paths[0] if paths else ""))
    return True
