"""
web
~~~
Client-side services that call the Villa API over HTTP.
"""
