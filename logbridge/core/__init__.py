"""Core domain: identifiers, records, messages and backend interfaces"""
