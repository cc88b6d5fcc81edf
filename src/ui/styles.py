"""Shared CSS and HTML helpers for the admin pages."""
from textwrap import dedent

import streamlit as st


def html_block(template: str) -> str:
    """Dedent markup and strip per-line indentation so Markdown doesn't read it as code."""
    lines = dedent(template).splitlines()
    return "\n".join(line.lstrip() for line in lines).strip()


def inject_admin_styles():
    """Inject admin page styles."""
    st.markdown(
        html_block(
            """
            <style>
            .admin-header {
                background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
                padding: 24px 32px;
                border-radius: 16px;
                margin-bottom: 24px;
            }
            .admin-title {
                color: #ffffff;
                font-size: 28px;
                font-weight: 700;
                margin: 0;
            }
            .admin-subtitle {
                color: rgba(255, 255, 255, 0.85);
                font-size: 14px;
                margin-top: 4px;
            }
            form[data-testid="stForm"][aria-label="admin_login_form"] {
                max-width: 420px;
                margin: 80px auto;
                border-radius: 24px;
                padding: 36px 40px;
                border: 1px solid rgba(148, 163, 184, 0.18);
            }
            .login-title {
                font-size: 30px;
                font-weight: 700;
                text-align: center;
                margin-bottom: 8px;
            }
            .login-description {
                font-size: 14px;
                text-align: center;
            }
            .empty-state {
                text-align: center;
                padding: 32px 0;
                color: rgba(148, 163, 184, 0.9);
            }
            </style>
            """
        ),
        unsafe_allow_html=True,
    )
