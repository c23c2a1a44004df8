"""Order-management bounded context: entities, ports and errors."""
