# api/params.py


def get_words(args):
    """
    Collect the `words` query parameter. Accepts both the repeated form
    (?words=a&words=b) and the comma-separated form (?words=a,b), or a mix.
    """
    words = []
    for raw in args.getlist("words"):
        words.extend(word.strip() for word in raw.split(",") if word.strip())
    return words
