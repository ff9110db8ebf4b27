#!/usr/bin/env python3
"""
Yardplan CLI - Entry point for the crane yard planner.

This module allows running the planner as:
    python -m yard_planner problem.txt
    yardplan problem.txt  (when installed via pip)
"""

from yard_planner.cli import main

if __name__ == "__main__":
    main()
