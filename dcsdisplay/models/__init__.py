"""Controller start-up sequences."""