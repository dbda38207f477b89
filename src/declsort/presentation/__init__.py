"""declsort presentation layer: public API and pytest plugin."""
