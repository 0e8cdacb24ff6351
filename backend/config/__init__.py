"""Django project package for the Music Streaming Dashboard backend."""
