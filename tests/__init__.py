"""Test suite for the Flip Greeting Service."""
