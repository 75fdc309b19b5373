"""Issue tracker table: fixture loading, row selection and table views."""
