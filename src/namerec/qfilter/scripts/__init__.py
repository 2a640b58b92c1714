"""Console scripts for qfilter."""
