#!/usr/bin/env python3
"""
Main test runner for the Conjoint tokenizer and parser.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_pipeline_check():
    """Tokenize and parse a small program end to end."""

    print("🚀 Conjoint Test Suite")
    print("=" * 60)

    try:
        from conjoint.lexer import Lexer
        from conjoint.parser import Parser
        from conjoint.printer import format_ast

        print("✅ All modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import modules: {e}")
        return False

    print("Testing the tokenize/parse pipeline...")
    code = """# settings
import { Int, String } from "std";
let retries : Int = 3;
let name : String? = null;
"""

    try:
        print("  🔧 Lexing...")
        tokens = Lexer(code).tokenize()
        print(f"     Generated {len(tokens)} tokens")

        print("  🔧 Parsing...")
        program = Parser(Lexer(code)).parse()
        print(f"     Generated AST with {len(program.body)} program elements")
        print()
        print(format_ast(program))
        print()

    except Exception as e:
        print(f"❌ Pipeline check FAILED: {e}")
        return False

    print("✅ Pipeline check PASSED")
    print()
    return True


def run_unit_tests():
    """Discover and run everything under tests/."""
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_pipeline_check() and run_unit_tests()
    sys.exit(0 if success else 1)
