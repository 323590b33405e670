"""
Tests for token and AST rendering.

Author: xwest
"""

import unittest
import sys
import os
import json

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from conjoint.lexer.lexer import Lexer
from conjoint.parser.parser import parse_string
from conjoint.parser.ast_nodes import ASTNode, ASTNodeType
from conjoint.printer import format_token, format_ast, token_to_dict, ast_to_dict


class TestTokenPrinting(unittest.TestCase):

    def test_format_token(self):
        lexer = Lexer("let\n  x")
        lexer.next_token()
        token = lexer.next_token()
        self.assertEqual(format_token(token), "\n".join([
            "TYPE: IDENTIFIER",
            "VALUE: `x`",
            "START: p 3 l 0 c 3",
            "END: p 7 l 1 c 3",
        ]))

    def test_token_to_dict(self):
        token = Lexer(">>>").next_token()
        self.assertEqual(token_to_dict(token), {
            "kind": "PUNCTUATOR",
            "text": ">>>",
            "start": {"offset": 0, "line": 0, "column": 0},
            "end": {"offset": 3, "line": 0, "column": 3},
        })


class TestASTPrinting(unittest.TestCase):

    def test_format_variable_declaration(self):
        program = parse_string("let n : Int? = 42;")
        expected = "\n".join([
            "TYPE: Program",
            "CHILDRENS:",
            "    body:",
            "        TYPE: VariableDeclaration",
            "        CHILDRENS:",
            "            id:",
            "                TYPE: Identifier",
            "                CHILDRENS:",
            "                    value: \"n\"",
            "            type:",
            "                TYPE: Identifier",
            "                CHILDRENS:",
            "                    value: \"Int\"",
            "            optional: true",
            "            init:",
            "                TYPE: Literal",
            "                CHILDRENS:",
            "                    value: 42.000000",
        ])
        self.assertEqual(format_ast(program), expected)

    def test_format_leaf_values(self):
        cases = [
            ("'c'", "value: 'c'"),
            ("false", "value: false"),
            ("null", "value: null"),
            ('"s"', 'value: "s"'),
        ]
        for source, line in cases:
            with self.subTest(source=source):
                text = format_ast(parse_string(f"let v : T = {source};"))
                self.assertIn(line, text)

    def test_format_childless_node(self):
        self.assertEqual(format_ast(parse_string("")), "TYPE: Program\nCHILDRENS: ~")
        self.assertEqual(format_ast(ASTNode(ASTNodeType.COMMENT), level=1),
                         "    TYPE: Comment\n    CHILDRENS: ~")

    def test_ast_to_dict_is_json_ready(self):
        program = parse_string('import { a } from "m";\nlet n : Int = 10;')
        data = ast_to_dict(program)
        json.dumps(data)

        import_decl, var_decl = [child["value"] for child in data["children"]]
        self.assertEqual(import_decl["kind"], "ImportDeclaration")
        self.assertEqual(import_decl["children"][0]["name"], "specifier")
        self.assertEqual(import_decl["children"][0]["value"]["children"][0],
                         {"name": "value", "kind": "string", "value": "a"})
        init = var_decl["children"][3]
        self.assertEqual(init["name"], "init")
        self.assertEqual(init["value"]["children"][0],
                         {"name": "value", "kind": "number", "value": "10"})
        self.assertEqual(var_decl["children"][2],
                         {"name": "optional", "kind": "boolean", "value": False})


if __name__ == '__main__':
    unittest.main()
