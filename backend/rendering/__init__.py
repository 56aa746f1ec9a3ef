"""Site rendering: component configuration, composition and page layouts."""
