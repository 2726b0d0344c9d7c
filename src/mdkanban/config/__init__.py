"""Configuration — defaults and layered loading."""

from mdkanban.config.hierarchy import load_config_hierarchy, policy_from_config

__all__ = ["load_config_hierarchy", "policy_from_config"]
