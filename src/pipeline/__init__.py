"""Decode pipeline driver.

This module acquires input from stdin or kubectl, runs the codec
and secret transforms, and renders the final document bytes.
"""
