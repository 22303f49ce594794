"""Shared pytest setup: run pygame headless and keep game logs quiet."""
import os

# Set headless mode for tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')
os.environ.setdefault('HIVE_LOG_LEVEL', 'WARNING')
