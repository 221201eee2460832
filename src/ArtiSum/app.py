"""Streamlit preview of an upload job summary."""

from __future__ import annotations

import streamlit as st

from ArtiSum import token_store
from ArtiSum.config import SummaryConfig
from ArtiSum.loaders import parse_path_list
from ArtiSum.models import BuildInfo, Operation, TransferResult
from ArtiSum.providers.artifactory import ArtifactoryClient, ArtifactoryError
from ArtiSum.summary_renderer import build_file_tree, render_job_summary


def _qp(key: str, default: str = "") -> str:
    """Read a query parameter, returning *default* if absent."""
    params = st.query_params
    return params.get(key, default)


def main() -> None:
    st.set_page_config(
        page_title="ArtiSum",
        page_icon="📦",
        layout="wide",
    )

    env_config = SummaryConfig.from_env()

    st.title("ArtiSum")
    st.caption("Preview the job summary for a set of uploaded artifacts.")

    with st.sidebar:
        st.subheader("Settings")
        platform_url = st.text_input(
            "Platform URL",
            value=_qp("platform") or env_config.platform_url,
            placeholder="https://acme.jfrog.io",
            help="Used to link files in the tree and to fetch build info.",
        ).strip().rstrip("/")

        saved_token = token_store.load(platform_url) or ""
        token = st.text_input(
            "Access token (optional)",
            value=saved_token,
            type="password",
            help="Required to fetch build info from a private platform.",
        )

        if token_store.is_available() and platform_url:
            remember = st.checkbox(
                "Save token to OS keychain",
                value=bool(saved_token),
            )
            if remember and token:
                token_store.save(platform_url, token)
            elif not remember and saved_token:
                token_store.delete(platform_url)

        default_max = int(_qp("max_entries", str(env_config.max_tree_entries)))
        max_entries = st.number_input(
            "Max files in tree",
            min_value=0,
            max_value=10_000,
            value=min(max(default_max, 0), 10_000),
            step=50,
            help="Above this many files the tree is left out of the summary.",
        )

    paths_raw = st.text_area(
        "Uploaded files (target path, optionally followed by the source path)",
        value=_qp("paths"),
        height=200,
        placeholder="libs-release/app/1.0/app.jar build/libs/app.jar",
    )
    failed = st.number_input("Failed uploads", min_value=0, value=0, step=1)

    col_name, col_number = st.columns(2)
    with col_name:
        build_name = st.text_input("Build name (optional)", value=_qp("build"))
    with col_number:
        build_number = st.text_input("Build number", value=_qp("number"))

    if st.button("Render", type="primary", use_container_width=True):
        _render_preview(
            paths_raw,
            int(failed),
            platform_url,
            token,
            int(max_entries),
            build_name.strip(),
            build_number.strip(),
        )


def _render_preview(
    paths_raw: str,
    failed: int,
    platform_url: str,
    token: str,
    max_entries: int,
    build_name: str,
    build_number: str,
) -> None:
    result = TransferResult(successes=parse_path_list(paths_raw), fail_count=failed)

    builds: list[BuildInfo] = []
    if build_name and build_number:
        if not platform_url:
            st.error("Set the platform URL to fetch build info.")
            return
        client = ArtifactoryClient(platform_url, token=token.strip() or None)
        try:
            with st.spinner("Fetching build info..."):
                builds.append(client.get_build_info(build_name, build_number))
        except ArtifactoryError as exc:
            st.error(str(exc))
            return
        except Exception as exc:
            st.error(f"Unexpected error: {exc}")
            return

    tree = build_file_tree(result.successes, platform_url, max_entries)
    if tree.overflowed:
        st.warning(
            f"More than {max_entries} files; the tree is left out of the summary."
        )
    else:
        st.info(f"{tree.size} files in tree.")

    markdown_output = render_job_summary(
        result,
        builds,
        operation=Operation.UPLOAD,
        platform_url=platform_url,
        max_entries=max_entries,
    )
    if not markdown_output:
        st.warning("Nothing to summarize.")
        return

    st.download_button(
        label="Download Markdown",
        data=markdown_output,
        file_name="github-action-summary.md",
        mime="text/markdown",
        use_container_width=True,
    )
    with st.expander("Rendered", expanded=True):
        st.markdown(markdown_output, unsafe_allow_html=True)
    with st.expander("Source", expanded=False):
        st.code(markdown_output, language="markdown")


if __name__ == "__main__":
    main()
