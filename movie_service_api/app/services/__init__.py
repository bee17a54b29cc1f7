"""
Service layer abstraction.

Each service encapsulates the logic behind one concern: reading and
searching the movie file, generating landing page colors and picking
aphorisms.  Endpoints stay thin and only translate results to HTTP.
"""
