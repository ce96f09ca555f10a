"""Small web helpers: SHA-1, cookies, query strings and mustache templates."""