"""IO layer: Parquet schemas and output path conventions."""
