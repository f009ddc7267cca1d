"""Query handlers; importing a module registers its handler."""
