"""
sqlcharset.constants - package constants

(c) 2023 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.1.0'
