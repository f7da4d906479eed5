"""Convert sing-box JSON subscriptions into a local config and a Surge external proxy line."""

__version__ = '0.1.0'
