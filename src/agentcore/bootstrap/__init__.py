"""Project bootstrap: tech-stack detection and project.json."""
