"""fluentlink — locale-aware link and content-state resolution for page trees."""

__version__ = "0.1.0"
