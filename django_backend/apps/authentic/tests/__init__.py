"""
Test package for the authentic application.

Contains tests for column lookup, configuration resolution, the
registration site, and the validators and serializers consuming the
resolved configuration.
"""
