"""Logging setup shared by the core modules."""

import logging

base_logger = logging.getLogger('plag_basic')
