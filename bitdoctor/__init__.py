"""bitdoctor - diagnoses for Bit workspaces."""
