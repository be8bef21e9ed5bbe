import difflib
import json
from pathlib import Path

import pytest

from json_to_php.pipeline import CodeGeneratorConfig, PipelineGenerator


def discover_test_cases():
    """Automatically discover all test cases from test_cases directory"""
    test_cases_dir = Path(__file__).parent / "test_data" / "test_cases"
    test_cases = []

    for test_dir in sorted(test_cases_dir.iterdir()):
        if not test_dir.is_dir() or test_dir.name.startswith("."):
            continue

        input_file = test_dir / "input.json"
        reference_file = test_dir / "reference.php"
        if not input_file.exists() or not reference_file.exists():
            continue

        test_cases.append(
            {
                "test_name": test_dir.name,
                "input_file": input_file,
                "config_file": test_dir / "config.json",
                "reference_file": reference_file,
            }
        )

    return test_cases


@pytest.mark.parametrize("test_case", discover_test_cases(), ids=lambda tc: tc["test_name"])
def test_reference_file_generation(test_case):
    """Test code generation against reference files"""
    with open(test_case["input_file"], encoding="utf-8") as f:
        data = json.load(f)

    if test_case["config_file"].exists():
        with open(test_case["config_file"], encoding="utf-8") as f:
            config = CodeGeneratorConfig.from_dict(json.load(f))
    else:
        config = CodeGeneratorConfig()

    # The test case directory name is the root class name
    generated_code = PipelineGenerator(test_case["test_name"], data, config).generate()

    with open(test_case["reference_file"], encoding="utf-8") as f:
        reference_code = f.read()

    # Normalize line endings for cross-platform compatibility
    generated_normalized = generated_code.replace("\r\n", "\n").strip()
    reference_normalized = reference_code.replace("\r\n", "\n").strip()

    if generated_normalized != reference_normalized:
        diff = difflib.unified_diff(
            reference_normalized.splitlines(keepends=True),
            generated_normalized.splitlines(keepends=True),
            fromfile="reference",
            tofile="generated",
            lineterm="",
        )
        pytest.fail(f"Generated code does not match reference for {test_case['test_name']}\n\nDiff:\n{''.join(diff)}")


def test_test_cases_discovered():
    assert [tc["test_name"] for tc in discover_test_cases()] == ["deep_arrays", "nested_user"]
