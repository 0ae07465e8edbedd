# file: league_app/site/views/content.py
"""Public blog and vlog listings (newest first)."""

from __future__ import annotations

from django.views.generic import ListView

from league_app.models import BlogPost, Vlog


class BlogListView(ListView):
    model = BlogPost
    template_name = "site/blog.html"
    context_object_name = "posts"
    paginate_by = 12


class VlogListView(ListView):
    model = Vlog
    template_name = "site/vlog.html"
    context_object_name = "vlogs"
    paginate_by = 12
