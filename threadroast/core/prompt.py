"""Roast prompt construction."""

from threadroast.models.profile import ThreadsProfile

POST_SEPARATOR = ", "


def build_prompt(account_name: str, profile: ThreadsProfile) -> str:
    """
    Build the completion prompt for a profile.

    Bio and post texts are embedded verbatim; posts are joined with ", ".

    Examples:
        bio "B", posts "P1" and "P2", account "acct" ->
        Roast the Threads account "acct" based on their bio and posts. Be
        funny and sarcastic. Here's their bio: "B". Here are some of their
        posts: P1, P2.
    """
    posts = POST_SEPARATOR.join(post.text for post in profile.posts)
    return (
        f'Roast the Threads account "{account_name}" based on their bio and posts. '
        "Be funny and sarcastic. "
        f'Here\'s their bio: "{profile.bio}". '
        f"Here are some of their posts: {posts}."
    )
