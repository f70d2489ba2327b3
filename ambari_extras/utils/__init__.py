"""
ambari-extras Utils - Logging and redaction helpers.
"""
