"""
String Helper Functions
Laravel-style string utilities, exposed to templates as filters
"""
import re


class Str:
    """
    String helper class (Laravel-style)

    Backs the default template filters registered by FilterExtension:
    snake, slug, title and limit.
    """

    @staticmethod
    def snake(value: str, delimiter: str = '_') -> str:
        """
        Convert a string to snake_case

        Example:
            Str.snake('BlogPost')   # 'blog_post'
            Str.snake('Blog Post')  # 'blog_post'
        """
        if not value:
            return value

        value = value.replace(' ', delimiter)
        value = re.sub('(.)([A-Z][a-z]+)', r'\1' + delimiter + r'\2', value)
        value = re.sub('([a-z0-9])([A-Z])', r'\1' + delimiter + r'\2', value)
        value = re.sub(f'{re.escape(delimiter)}+', delimiter, value.lower())

        return value.strip(delimiter)

    @staticmethod
    def slug(value: str, separator: str = '-') -> str:
        """
        Generate a URL-friendly slug

        Example:
            Str.slug('Hello World!')  # 'hello-world'
        """
        if not value:
            return value

        value = re.sub(r'[^a-z0-9\s-]', '', value.lower())
        value = re.sub(r'[\s-]+', separator, value)

        return value.strip(separator)

    @staticmethod
    def title(value: str) -> str:
        """Convert snake_case or kebab-case to Title Case"""
        if not value:
            return value

        return value.replace('_', ' ').replace('-', ' ').title()

    @staticmethod
    def limit(value: str, limit: int = 100, end: str = '...') -> str:
        """
        Truncate a string to `limit` characters, appending `end`

        Example:
            Str.limit('Hello World', 5)  # 'Hello...'
        """
        if not value or len(value) <= limit:
            return value

        return value[:limit].rstrip() + end
