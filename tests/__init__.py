"""
create-react-csp-app test suite
===============================

Test Modules
------------
- test_models.py: Tests for the Pydantic models
- test_prompts.py: Tests for the question sequence
- test_resolver.py: Tests for option resolution
- test_runner.py: Tests for external tool invocation
- test_generator.py: Tests for project materialization
- test_cli.py: Tests for the command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_resolver.py

    # Run specific test class
    pytest tests/test_resolver.py::TestResolveDependencies
"""
