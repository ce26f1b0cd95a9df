"""
Functional tests driven by the JSON cases in test_data/functional.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from openapi_to_amplify.pipeline import CodeGeneratorConfig, PipelineGenerator


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _generate_code(schemas, include):
    config = CodeGeneratorConfig(include=include, add_generation_comment=False)
    return PipelineGenerator(schemas, config).generate()


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda test_case: test_case["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    name = test_case["name"]
    source_file = test_case["_source_file"]

    print(f"\nTesting: {name} (from {source_file})")
    print(f"Description: {test_case['description']}")

    generated_code = _generate_code(test_case["schemas"], test_case.get("include", []))

    for pattern in test_case["expected_contains"]:
        assert pattern in generated_code, f"Expected pattern {pattern!r} not found in output:\n{generated_code}"

    for pattern in test_case["expected_not_contains"]:
        assert pattern not in generated_code, f"Unexpected pattern {pattern!r} found in output:\n{generated_code}"


if __name__ == "__main__":
    pytest.main([__file__])
