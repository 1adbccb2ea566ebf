"""Service layer — locale registry, context stack, and the resolvers built on them."""
