"""Platform services shared across headr layers."""
