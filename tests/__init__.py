"""Test suite for gostsign."""
