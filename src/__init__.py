"""Solidity compiler command builder."""
