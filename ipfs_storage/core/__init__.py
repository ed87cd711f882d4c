"""Core building blocks: configuration, errors, file sources, IPFS and registry."""
