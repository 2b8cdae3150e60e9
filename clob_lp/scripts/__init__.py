"""Command line tools for the ladder engine"""
