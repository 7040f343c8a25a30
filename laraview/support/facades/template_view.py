"""
TemplateView Facade
Provides static access to the view factory
"""
from laraview.support.facades.facade import Facade


class TemplateView(Facade):
    """
    View factory facade

    Example:
        TemplateView.composer('pages.home', lambda view: {'posts': latest_posts()})
        TemplateView.share('site_name', 'Docs')

        if TemplateView.exists('errors.404'):
            html = TemplateView.fetch('errors.404', {'path': path})
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        return 'view'
