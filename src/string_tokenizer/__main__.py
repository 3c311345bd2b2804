# src/string_tokenizer/__main__.py
from string_tokenizer.demo import main

if __name__ == "__main__":
    main()
