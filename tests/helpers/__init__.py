"""Test helpers for the transedit test suite.

- io_utils: writing/reading JSON and YAML fixture files
- projects: TranslationProject, a throwaway translation project on disk
"""
