"""
Web middleware: error handling, authentication, CORS guard and access logging.
"""
