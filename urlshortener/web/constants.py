# Log event codes
FORM_SERVED = 'FORM_SERVED'
MISSING_URL = 'MISSING_URL'
LINK_CREATED = 'LINK_CREATED'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
DATASTORE_ERROR = 'DATASTORE_ERROR'
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'

FORM_HTML = """<!DOCTYPE html>
<html>
<head>
    <title>URL Shortener</title>
</head>
<body>
    <h2>URL Shortener</h2>
    <form method="post" action="/shorten">
        <input type="url" name="url" placeholder="Enter a URL" required>
        <input type="submit" value="Shorten">
    </form>
</body>
</html>
"""

SHORTENED_HTML = '<p>Shortened URL: <a href="{short_url}">{short_url}</a></p>'
