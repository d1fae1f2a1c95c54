"""Configuration - settings and feed definitions."""
