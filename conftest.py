"""Root conftest: puts the project root on sys.path so `import config` works in tests."""
