#!/usr/bin/env python3
"""
Simple installation test script for the orthopoly package.
Run this to test if your package can be installed and imported correctly.
"""

import subprocess
import sys
import os


def run_command(cmd, description):
    """Run a command and return success status."""
    print(f"\n🔄 {description}...")
    result = subprocess.run(cmd, shell=True, capture_output=True, text=True)
    if result.returncode == 0:
        print(f"✅ {description} successful!")
        return True
    print(f"❌ {description} failed!")
    print(f"Error: {result.stderr}")
    return False


def test_imports():
    """Test if the package can be imported correctly."""
    print("\n🧪 Testing package imports...")

    try:
        import orthopoly
        print(f"✅ Main package imported successfully! Version: {orthopoly.__version__}")

        # Test key modules
        from orthopoly.polynomials import Polynomial
        from orthopoly.inner_products import LegendreInnerProduct
        from orthopoly.bases import GramSchmidtBuilder
        from orthopoly.cli import main

        print("✅ All key modules imported successfully!")
        return True

    except ImportError as e:
        print(f"❌ Import failed: {e}")
        return False


def main():
    """Main installation test function."""
    print("🚀 orthopoly - Installation Test")
    print("=" * 50)

    # Check if we're in the right directory
    if not os.path.exists("pyproject.toml"):
        print("❌ Error: pyproject.toml not found. Please run this script from the project root.")
        sys.exit(1)

    success = True

    # Try to install in development mode (with the test extra)
    if not run_command("uv pip install -e '.[test]'", "Installing package in development mode"):
        success = False

    if not test_imports():
        success = False

    # Test CLI
    if not run_command("orthopoly version", "Testing CLI version command"):
        success = False

    if not run_command("orthopoly info", "Testing CLI info command"):
        success = False

    if not run_command("pytest tests/ -v", "Running tests"):
        success = False

    print("\n" + "=" * 50)
    if success:
        print("🎉 All tests passed! Your package is working correctly.")
        print("\nYou can now:")
        print("  • Import the package: import orthopoly")
        print("  • Use the CLI: orthopoly --help")
        print("  • Print the reference bases: orthopoly demo")
    else:
        print("❌ Some tests failed. Please check the errors above.")
        sys.exit(1)


if __name__ == "__main__":
    main()
