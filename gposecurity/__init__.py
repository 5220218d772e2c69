"""Group Policy Security Settings: resource schema, policy sections and INF template sections."""

__version__ = "0.1.0"
__all__ = ["schema", "policies", "sections"]