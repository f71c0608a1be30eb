"""Command line interface for notarize-tool"""
