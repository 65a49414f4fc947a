#!/usr/bin/env python3
"""
Craps - Main Entry Point

Prints a greeting. The table itself runs as a Streamlit app.
"""


def main():
    """Greet the player and show how to launch the table."""
    print("Hello World!")
    print("Launch the craps table with:  streamlit run src/ui/app.py")


if __name__ == "__main__":
    main()
