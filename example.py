"""Example: news and sports channels with three filtering subscribers."""

import logging

from dotenv import load_dotenv

from eventmsg import Publisher, Subscriber
from eventmsg.presentation import format_history, format_inbox, format_interests

load_dotenv()
logging.basicConfig(level=logging.INFO)


def main() -> None:
    news = Publisher("Haber TV")
    sports = Publisher("Spor Kanalı")

    ali = Subscriber("Ali")
    ayse = Subscriber("Ayşe")
    mehmet = Subscriber("Mehmet")

    ali.add_interest("Haber")
    ayse.add_interest("Spor")
    ayse.add_interest("Haber")
    mehmet.add_interest("Teknoloji")

    ali.subscribe_to(news)
    ayse.subscribe_to(news)
    ayse.subscribe_to(sports)
    # Mehmet only wants technology, so news items are filtered out.
    mehmet.subscribe_to(news)

    news.publish("Seçim sonuçları açıklandı!", "Haber")
    sports.publish("Fenerbahçe şampiyon oldu!", "Spor")
    news.publish("Yeni iPhone çıktı!", "Teknoloji")

    for subscriber in (ali, ayse, mehmet):
        print(format_interests(subscriber))
        print(format_inbox(subscriber))
    for publisher in (news, sports):
        print(format_history(publisher))


if __name__ == "__main__":
    main()
