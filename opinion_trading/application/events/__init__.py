"""Events application layer: event lifecycle management and ingestion."""
