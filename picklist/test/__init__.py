"""The package contains the facilities for testing picklist and the projects using it."""
