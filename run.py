#!/usr/bin/env python3
"""
Run script for the Secure API
"""
from secure_api.main import run

if __name__ == "__main__":
    run()
