"""
Catalog Domain - Entities, Value Objects and Ports.

This domain handles the calculator catalog:
- Calculators (one per client component)
- Calculator categories (navigation groups)
- The static fallback list bundled with the build
- The component kind registry
"""
