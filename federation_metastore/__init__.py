"""Federation metastore translation layer between partner wire models and persisted records."""
