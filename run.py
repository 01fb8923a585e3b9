#!/usr/bin/env python3
"""
PLANE WAR Launcher
===================
Run this script to start the game.
"""

from plane_war.main import main

if __name__ == "__main__":
    main()
