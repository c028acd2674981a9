# ABOUTME: Flipbook turns one long structured-text document into a paginated, navigable book.
# ABOUTME: The compiler lives in flipbook.compiler; sources, formats, and cli build around it.
