"""Pure grouped-notification logic: open enumerations, merging and capabilities."""
