"""UI testing: framework, page objects and browser test suites."""
