"""Resource document codec.

This module detects whether input is JSON or YAML and parses it.
It writes transformed documents back in the format they arrived in.
"""
