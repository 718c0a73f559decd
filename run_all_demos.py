#!/usr/bin/env python3
"""
Run All Demos - Launcher for the PID Learning Lab demonstrations.
"""

import sys
import importlib
from pathlib import Path

# Ensure we can import from the project
sys.path.insert(0, str(Path(__file__).parent))


DEMOS = {
    '1': ('examples.demo_learn', 'Learn: Build Your PID'),
    '2': ('examples.demo_tune', 'Tune: Beat the Baseline'),
}


def print_menu():
    """Print demo menu."""
    print("\n" + "=" * 70)
    print("   PID LEARNING LAB - DEMONSTRATIONS")
    print("=" * 70)
    print("\nAvailable Demonstrations:")
    print("-" * 40)
    print("  1. Learn: Build Your PID")
    print("     - P, PI and PID step by step")
    print("     - P / I / D gain sweeps")
    print("     - Tuning hints")
    print()
    print("  2. Tune: Beat the Baseline")
    print("     - PID vs bang-bang baseline")
    print("     - Scorecard on three scenarios")
    print()
    print("  3. Run ALL demos")
    print("  0. Exit")
    print("-" * 40)


def run_demo(key: str) -> bool:
    """Run a specific demo."""
    module_name, title = DEMOS[key]
    
    print(f"\n{'=' * 70}")
    print(f"   Running: {title}")
    print('=' * 70)
    
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        print(f"Failed to import demo: {e}")
        print("Make sure the project is installed: pip install -e .")
        return False
    
    module.main()
    return True


def main():
    """Main entry point."""
    while True:
        print_menu()
        choice = input("\nEnter your choice (0-3): ").strip()
        
        if choice == '0':
            print("\nGoodbye.\n")
            break
        elif choice == '3':
            for key in DEMOS:
                run_demo(key)
        elif choice in DEMOS:
            run_demo(choice)
        else:
            print("\nInvalid choice. Please enter 0-3.")


if __name__ == "__main__":
    main()
