def pytest_configure(config):
    config.addinivalue_line("markers", "performance: timing and throughput tests")
